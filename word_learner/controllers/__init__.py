"""
Controllers Package

Contains the Flask blueprints for the game API and the browser shell.
"""
