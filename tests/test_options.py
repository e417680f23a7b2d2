import numpy as np
import pytest

import esrc
from esrc import ConfigError, ESRCOptions


def test_defaults():
    opts = ESRCOptions.from_value(None)
    assert opts.verbose is False
    assert opts.eigenface is True
    assert opts.eigenface_dim is None


def test_from_dict():
    opts = ESRCOptions.from_value({'verbose': True, 'eigenface_dim': 4})
    assert opts.verbose is True
    assert opts.eigenface is True
    assert opts.eigenface_dim == 4
    assert ESRCOptions.from_value(opts) is opts


def test_numpy_values_accepted():
    opts = ESRCOptions(verbose=np.bool_(True), eigenface_dim=np.int64(3))
    assert opts.verbose is True
    assert opts.eigenface_dim == 3


@pytest.mark.parametrize('options', [
    {'lambda': 0.1},
    {'eigenface': 1},
    {'eigenface_dim': 2.5},
    {'eigenface_dim': 0},
    {'eigenface_dim': True},
    'verbose',
    ])
def test_rejected(options):
    with pytest.raises(ConfigError):
        ESRCOptions.from_value(options)


def test_resolve_eigenface_dim():
    assert ESRCOptions().resolve_eigenface_dim(10, 9) == 9
    assert ESRCOptions().resolve_eigenface_dim(10, 50) == 10
    assert ESRCOptions(eigenface_dim=4).resolve_eigenface_dim(10, 9) == 4
    with pytest.raises(ConfigError):
        ESRCOptions(eigenface_dim=10).resolve_eigenface_dim(10, 9)
    with pytest.raises(ConfigError):
        ESRCOptions().resolve_eigenface_dim(1, 0)


def test_package_configuration():
    assert esrc.lasso_solver == 'lars'
    assert esrc.norm_mode == 'std'
    assert isinstance(esrc.lasso_max_iter, int)
    assert isinstance(esrc.lasso_tol, float)
    assert isinstance(esrc.lars_max_iter, int)
    assert isinstance(esrc.lasso_gap_rtol, float)
    assert esrc.n_jobs == 1


def test_extra_configuration_file(tmp_path, restore_config):
    conf = tmp_path / 'local.conf'
    conf.write_text('[run]\nn_jobs = 4\nnorm_mode = zscore\n')
    esrc.initialize(str(conf))
    assert esrc.n_jobs == 4
    assert esrc.norm_mode == 'zscore'
    # untouched keys keep their defaults
    assert esrc.lasso_solver == 'lars'
