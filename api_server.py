"""
API Server Entry Point

Run the habits API server using:
    python api_server.py

Or with uvicorn:
    uvicorn api_server:app --host 0.0.0.0 --port 8080

Configuration is read from config/config.ini and the environment
(CORS_ORIGIN, LOG_LEVEL, API_HOST, API_PORT).
"""

from lembrancas.api.server import create_app
from lembrancas.config.loader import ConfigLoader
from lembrancas.utils.logger import setup_logger

config = ConfigLoader()
logger = setup_logger(config, log_to_file=False)

# Create the FastAPI application
app = create_app(config=config.as_environ())

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting API on {config.api_host}:{config.api_port}, CORS origin {config.cors_origin}")
    uvicorn.run(app, host=config.api_host, port=config.api_port)
