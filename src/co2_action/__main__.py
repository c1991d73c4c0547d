from co2_action.main import main

main()
