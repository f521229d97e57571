"""
Monad MCP server package.

This package exposes a small, fixed set of LLM-facing tools backed by a Monad
(EVM) JSON-RPC endpoint. See DESIGN.md for full details.
"""
