from railclock.cli import main

main()
