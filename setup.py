"""Setup for IntervalTimer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "IntervalTimer",
        "CFBundleDisplayName": "Interval Timer",
        "CFBundleIdentifier": "com.intervaltimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

setup(
    app=APP,
    data_files=DATA_FILES,
    options={"py2app": OPTIONS},
    name="IntervalTimer",
    version="0.1.0",
    python_requires=">=3.10",
    packages=find_packages(include=["intervaltimer", "intervaltimer.*"]),
    install_requires=[
        "PyQt6",
        "SQLAlchemy>=2.0",
        "numpy",
        "loguru",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
