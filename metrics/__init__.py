"""Metric model, exposition writer and scrape coordination"""
