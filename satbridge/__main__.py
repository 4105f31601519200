from satbridge.cli import main

main()
