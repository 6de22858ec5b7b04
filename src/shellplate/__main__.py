from shellplate.cli import main

main()
