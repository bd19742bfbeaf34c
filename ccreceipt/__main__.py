from ccreceipt.cli import main

main()
