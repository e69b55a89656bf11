"""Request dispatchers for the metrics endpoint"""
