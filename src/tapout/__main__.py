from tapout.app import main

main()
