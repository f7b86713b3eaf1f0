"""
Shared utilities for topology translation.

This package contains common functionality:
- logging_config: consistent logging setup for library consumers and tools
"""
