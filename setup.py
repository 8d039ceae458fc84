from glob import glob
from setuptools import setup


setup(
    name='badrpn',
    version='0.1.0',
    description='Crude fixed-point RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit>=3',
    ],
    packages=['badrpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='MIT',
)
