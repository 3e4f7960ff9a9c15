from stock_prediction.main import main

main()
