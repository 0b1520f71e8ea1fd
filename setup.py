from setuptools import setup, find_packages

setup(
    name="pycircfit",
    version="0.1",
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
