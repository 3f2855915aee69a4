from apimocker.cli import main

main()
