from hashcrawler.cli import main

main()
