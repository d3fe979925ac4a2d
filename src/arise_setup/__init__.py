"""arise-setup - turn a fresh Cordova project into the Arise launcher shell."""

__version__ = "0.1.0"
