"""CleanSync client portal API"""
