"""
Command line front end
"""
