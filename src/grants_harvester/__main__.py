from grants_harvester.cli.main import main

main()
