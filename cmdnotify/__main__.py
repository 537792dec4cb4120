from cmdnotify.cli import main

main()
