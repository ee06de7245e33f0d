"""
tfcopen - Terraform Cloud workspace opener

Finds the nearest .tfcopen marker file (or git repository root) above the
current directory and opens the matching Terraform Cloud page in a browser.
"""

__version__ = "0.1.0"
__author__ = "tfcopen contributors"
