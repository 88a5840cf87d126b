from bestsubset.cli import main

main()
