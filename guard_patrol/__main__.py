from guard_patrol.experiments.solve import main

if __name__ == "__main__":
    main()
