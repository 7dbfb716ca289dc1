from ach_viewer.cli import main

main()
