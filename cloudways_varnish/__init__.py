"""
Trigger Cloudways Varnish service actions from the command line.
"""
