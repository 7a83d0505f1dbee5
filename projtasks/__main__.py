from projtasks.cli import main

main()
