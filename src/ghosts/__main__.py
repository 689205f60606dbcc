from ghosts.main import main

main()
