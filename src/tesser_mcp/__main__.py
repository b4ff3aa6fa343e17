from tesser_mcp.cli import main

main()
