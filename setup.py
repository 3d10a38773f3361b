"""Setup for FocusDash.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "FocusDash",
        "CFBundleDisplayName": "FocusDash",
        "CFBundleIdentifier": "com.focusdash.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app is only needed when building the bundle
py2app_extras = {}
if "py2app" in sys.argv:
    py2app_extras = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="FocusDash",
    version="0.1.0",
    description="Focus-session (Pomodoro) timer for the FocusDash productivity dashboard",
    packages=[
        "focusdash",
        "focusdash.audio",
        "focusdash.notify",
        "focusdash.timer",
        "focusdash.ui",
    ],
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.5",
        "numpy>=1.24",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": ["focusdash = focusdash.__main__:main"],
    },
    **py2app_extras,
)
