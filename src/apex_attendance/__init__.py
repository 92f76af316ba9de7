"""Apex site attendance package.

Organized by feature modules (sites, workers, attendance, ...) with a thin
Flask controller layer over service/repository layers.
"""
