from textloader.cli import main

main()
