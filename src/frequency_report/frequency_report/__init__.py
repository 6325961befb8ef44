"""Apprentice frequency report package.

Feature modules (dataset, report) with a thin Flask controller layer on top of
plain services. The dataset is held in memory for the lifetime of the process.
"""
