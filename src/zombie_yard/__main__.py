from .zombie_yard import main

main()
