# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Example agent servers (HTTP and MCP)."""
