"""kibana_me_logs package: open the Kibana dashboard of a Cloud Foundry app.

The Kibana app and the target app must share the same logstash service instance.
"""

__version__ = "0.2.0"

__all__: list[str] = ["__version__"]
