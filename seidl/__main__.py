from seidl.main import main

main()
