from projournal.cli import main

main()
