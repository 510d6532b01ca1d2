"""In-memory movie metadata and rating services: discovery, models, handlers and gateways."""