from zeus.repl import main

main()
