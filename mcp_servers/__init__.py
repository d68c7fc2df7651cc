"""MCP servers and clients for the MiniMax and Gaode vendor APIs."""
