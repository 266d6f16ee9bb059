from setup_luarocks.cli import main

main()
