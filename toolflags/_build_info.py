"""Build information - auto-generated during install, do not edit."""

# Stub values - populated during pip install by the setup.py build hook
BUILD_ID = ""
BUILD_TIME = ""
