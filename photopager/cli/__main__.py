"""Allow ``python -m photopager.cli`` execution (runs ``browse``)."""

from photopager.cli.browse import main

main()
