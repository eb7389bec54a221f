"""consulta-ibge: a small client for the IBGE "localidades" REST API."""

__version__ = "0.1.0"
