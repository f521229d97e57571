from monad_mcp.stdio import main

main()
