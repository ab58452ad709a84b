"""Avni MCP server.

This package exposes administrative operations on the Avni health-data
platform (organisations, users, locations, subject types, programs) as
tools that an MCP host or a LangChain agent can call.
"""
