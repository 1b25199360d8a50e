"""
Core application components: factory, lifecycle and shared utilities
"""
