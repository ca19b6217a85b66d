from actionkit.cli.main import main

main()
