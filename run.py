# /run.py
"""
Starts the interactive records console.

Equivalent to ``hms console``; the configuration profile comes from
HMS_CONFIG (see config.py).
"""
import sys

from hms.commands import cli

if __name__ == '__main__':
    sys.exit(cli(['console'], obj={}))
