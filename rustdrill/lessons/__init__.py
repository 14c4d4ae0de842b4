"""Worked solutions to many of the exercises, one module per topic."""