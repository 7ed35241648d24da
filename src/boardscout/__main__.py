from boardscout.cli import main

main()
