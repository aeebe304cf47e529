"""rating data model, configuration and errors"""
