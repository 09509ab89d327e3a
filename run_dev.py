import uvicorn
from dotenv import load_dotenv
import os
from pathlib import Path
import logging

# Configure logging before any application imports to ensure visibility
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s RUN_DEV.PY - [%(levelname)s] - %(message)s'
)
logger = logging.getLogger("run_dev_script")

TRUE_VALUES = ["true", "1", "yes", "on", "t"]

if __name__ == "__main__":
    project_root = Path(__file__).parent.resolve()
    dotenv_path_explicit = project_root / ".env"

    logger.info(f"Project root (derived from __file__): {project_root}")

    if dotenv_path_explicit.exists():
        logger.info(f".env file FOUND at: {dotenv_path_explicit}")
        load_dotenv(dotenv_path=dotenv_path_explicit, override=True)
    else:
        logger.warning(f".env file NOT FOUND at: {dotenv_path_explicit}. "
                      "Will rely on OS environment variables or pydantic-settings defaults.")

    # Log key environment variables for verification, secrets masked
    logger.info(f"LINKEDIN_LOGON_LINKEDIN_APP_ID: {os.getenv('LINKEDIN_LOGON_LINKEDIN_APP_ID')}")
    _secret_val = os.getenv('LINKEDIN_LOGON_LINKEDIN_APP_SECRET')
    logger.info(f"LINKEDIN_LOGON_LINKEDIN_APP_SECRET: {'********' if _secret_val else 'None'}")
    _key_val = os.getenv('LINKEDIN_LOGON_STATE_COOKIE_KEY')
    logger.info(f"LINKEDIN_LOGON_STATE_COOKIE_KEY: {'********' if _key_val else 'None'}")

    host = os.getenv("DEV_SERVER_HOST", "127.0.0.1")
    port = int(os.getenv("DEV_SERVER_PORT", "8000"))
    uvicorn_log_level = os.getenv("DEV_SERVER_LOG_LEVEL", "info").lower()

    debug_mode_env_val = os.getenv("LINKEDIN_LOGON_DEBUG_MODE", "False").lower()
    reload_env_val = os.getenv("DEV_SERVER_RELOAD", str(debug_mode_env_val in TRUE_VALUES)).lower()
    reload_bool = reload_env_val in TRUE_VALUES

    logger.info(f"Starting Uvicorn server on {host}:{port} (reload: {reload_bool})")

    uvicorn.run(
        "linkedin_logon.main:app",
        host=host,
        port=port,
        log_level=uvicorn_log_level,
        reload=reload_bool
    )
