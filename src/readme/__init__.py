# ABOUTME: ReadMe, a personal reading list with reviews and covers.
# ABOUTME: Subpackages: library (core), db (SQLite store), covers, formats, cli.
