from glob import glob
from setuptools import setup


setup(
    name='expression-parser',
    use_scm_version={
        # Not every checkout is a git checkout
        'fallback_version': '0.1.0',
    },
    description='Arithmetic expression parser and evaluator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    python_requires='>=3.6',
    packages=['expression_parser'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
