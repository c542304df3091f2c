from transit_planner.server import main

main()
