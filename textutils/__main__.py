from textutils.launcher import main

main()
