from pkgdelta.cli.app import main

main()
