from setuptools import setup

if __name__=='__main__':
    setup(
        name = 'esrc',
        version = '1.0',
        description = 'Extended sparse representation classification '
                      '(ESRC) for face recognition',
        packages = [
            'esrc',
            'esrc.dict',
            'esrc.faces',
            'esrc.opt',
            ],
        package_data = {'esrc': ['conf/conf.txt']},
        python_requires = '>=3.8',
        install_requires = [
            'numpy',
            'scipy',
            'scikit-learn',
            'joblib',
            ],
        extras_require = {'test': ['pytest']},
    )
