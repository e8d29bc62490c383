"""
Interface package: text front ends for the engine.

Modules:
    console - Human-versus-computer game in the terminal.
              Run with: python -m interface.console
    uci     - Universal Chess Interface (UCI) protocol handler.
              Reads commands from stdin, writes responses to stdout.
              Can be run as a standalone script: python interface/uci.py
"""
