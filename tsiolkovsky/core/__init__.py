"""Core calculation modules.

- rocket_equation: closed-form solutions of the Tsiolkovsky rocket equation
"""
