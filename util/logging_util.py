import logging
import sys
from typing import TextIO
# Configure logging format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logger(name: str, level=logging.INFO, stream: TextIO = None) -> logging.Logger:
    """
    Sets up a logger with consistent formatting.
    
    Args:
        name: Name of the logger (typically __name__ from the calling module)
        level: Logging level (default: INFO)
        stream: Where the handler writes (default: stdout)
    
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Avoid adding handlers multiple times
    if not logger.handlers:
        # Console handler
        console_handler = logging.StreamHandler(stream or sys.stdout)
        console_handler.setLevel(level)
        
        # Formatter
        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
        console_handler.setFormatter(formatter)
        
        logger.addHandler(console_handler)
    
    return logger

def log_telegram_message_sent(logger: logging.Logger, chat_id: str, text: str):
    """
    Logs a sent Telegram message.
    
    Args:
        logger: Logger instance to use
        chat_id: Chat ID where message was sent
        text: Message text
    """
    logger.info(f"📤 Telegram Message Sent - Chat: {chat_id}")
    logger.info(f"  Text: {text[:200]}{'...' if len(text) > 200 else ''}")

def log_api_response(logger: logging.Logger, body: bytes):
    """
    Logs the raw body returned by the Telegram API.
    
    Args:
        logger: Logger instance to use
        body: Response body as received
    """
    logger.info(f"Response: {body.decode('utf-8', errors='replace')}")
