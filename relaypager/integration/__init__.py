""" Integrations with other libraries. Every integration is optional: import it explicitly """
