# -*- coding: utf-8 -*-

from setuptools import setup


setup(
    name="jsonpp",
    version="1.0.0",
    packages=["jsonpp"],
    python_requires=">=3.8",
    install_requires=["funcparserlib>=1.0.0,<2.0"],
    entry_points={"console_scripts": ["jsonpp = jsonpp.cli:main"]},
    extras_require={"test": ["pytest"]},
    description="JSON reader and pretty-printer built on funcparserlib",
    license="MIT",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing",
    ],
)
