"""MCP server that serves AGENT.md files from configured GitHub repositories."""
