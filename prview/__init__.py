"""
prview - Browse a repository's GitHub pull requests from the terminal.

A CLI tool that:
1. Resolves owner/repo from the local repository's origin remote
2. Fetches the open pull requests from the GitHub REST API
3. Shows them in an interactive table
4. Opens the selected pull request in the browser

Usage:
    prview                  # Run inside a GitHub checkout
    prview --path ../other  # Run against another checkout
"""

__version__ = "0.1.0"
__author__ = "prview"
