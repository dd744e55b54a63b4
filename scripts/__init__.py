"""
Helper scripts for the lake sonde data fetch
Run from the project root as modules, e.g. python -m scripts.read_full_table
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""
