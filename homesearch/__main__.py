from homesearch.cli import main

main()
