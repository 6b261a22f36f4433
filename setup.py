import setuptools
import sys

pure_python = False
pure_notice = "\n\n**Warning!** *This package is the zero-dependency version of md4digest. It always uses the internal MD4 implementation, which is considerably slower than the native backend. You should almost certainly use the [normal package](https://pypi.org/project/md4digest) instead.*"

if '--pure' in sys.argv:
    pure_python = True
    sys.argv.remove('--pure')
    print("Building pure-python wheel")

exec(open("MD4/_version.py", "r").read())

with open("README.md", "r") as fh:
    long_description = fh.read()

if pure_python:
    pkg_name = "md4digestpure"
    requirements = []
    long_description = long_description+pure_notice
else:
    pkg_name = "md4digest"
    requirements = ['pycryptodomex>=3.9']

setuptools.setup(
    name=pkg_name,
    version=__version__,
    description="MD4 message digest sessions with a native backend and a self-contained fallback",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.6',
)
