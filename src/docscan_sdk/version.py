"""Version information for the Doc Scan Python SDK"""

__version__ = "0.1.0"
