"""
Simple shim for running the compliance suite during development.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import sys

import ga4gh.cts.cli.cts as cli_cts

if __name__ == "__main__":
    sys.exit(cli_cts.cts_main())
