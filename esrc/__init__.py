# set up local configuration before anything else
import os
from configparser import ConfigParser


def _coerce(value):
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def initialize(extra_conf=None):
    """
    Read conf/conf.txt (and then the file named by $ESRC_CONF, if any)
    into the package namespace, such that configuration parameters are
    available as esrc.param_xyz
    """
    gdict = globals()
    this_dir = os.path.split(os.path.abspath(__file__))[0]
    conf_files = [os.path.join(this_dir, 'conf', 'conf.txt')]
    extra_conf = extra_conf or os.environ.get('ESRC_CONF')
    if extra_conf:
        conf_files.append(extra_conf)
    sf = ConfigParser()
    sf.read(conf_files)
    for section in sf.sections():
        gdict.update((k, _coerce(v)) for k, v in sf.items(section))
    gdict['__init'] = True
    return

initialize()

from .errors import ConfigError, SolverError
from .options import ESRCOptions
from .samples import SampleSet
from .faces.classify import esrc, esrc_predict

__all__ = [
    'ConfigError', 'SolverError', 'ESRCOptions', 'SampleSet',
    'esrc', 'esrc_predict', 'initialize',
]
