from personnel.main import main

main()
