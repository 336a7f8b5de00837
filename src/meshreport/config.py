"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and defaults.

Why is this file needed?
------------------------
1. Abstraction: It keeps the default input filename and environment variable
   names in one place instead of scattering them through the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled sample mesh when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_MESH_PATH (str): Absolute path to the bundled sample mesh file.
    DEFAULT_INPUT_FILENAME (str): File read when no input is given.
"""
import sys
import os
from pathlib import Path
from typing import Optional

# Environment variables
INPUT_ENV: str = "MESHREPORT_INPUT"
LOG_LEVEL_ENV: str = "MESHREPORT_LOG_LEVEL"

DEFAULT_INPUT_FILENAME: str = "data.txt"
DEFAULT_LOG_LEVEL: str = "WARNING"


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/meshreport/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_input_path(override: Optional[str] = None) -> str:
    """
    Resolve the mesh file to read.

    Precedence: explicit override > MESHREPORT_INPUT > ./data.txt
    """
    if override:
        return override
    from_env = os.getenv(INPUT_ENV)
    if from_env:
        return from_env
    return os.path.join(os.getcwd(), DEFAULT_INPUT_FILENAME)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_MESH_PATH: str = os.path.join(ASSETS_PATH, DEFAULT_INPUT_FILENAME)
