"""Command-line tools for photopager.

- ``python -m photopager.cli.browse``: walk a feed page by page through
  the pagination controller and print each page.
- ``python -m photopager.cli``: same as ``browse``.

Uses argparse, and defers the component imports into the command body so
``--help`` stays fast.
"""
