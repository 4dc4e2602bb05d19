import os
import threading
import psutil
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator

# Initialize logger outside the handler for performance
logger = Logger(service="signstamp")


def summarize_response(response):
    """Strip the body from a proxy response; signed PDFs are large base64 blobs."""
    if not isinstance(response, dict):
        return response
    body = response.get("body") or ""
    return {
        "statusCode": response.get("statusCode"),
        "headers": response.get("headers"),
        "isBase64Encoded": response.get("isBase64Encoded", False),
        "body_length": len(body),
    }


def summarize_event(event):
    """Drop the request body from an API Gateway event before logging it."""
    if not isinstance(event, dict) or "body" not in event:
        return event
    body = event.get("body") or ""
    return {**event, "body": f"<{len(body)} chars>"}


@lambda_handler_decorator
def logging_middleware(handler, event, context):
    """Middleware to automatically handle structured logging."""
    # Inject context into the logger
    logger.append_keys(
        handler=handler.__name__,
        request_id=getattr(context, "aws_request_id", None),
    )

    # Log system details at the start
    vm_start = psutil.virtual_memory()
    system_info_start = {
        "cpu_cores": os.cpu_count(),
        "memory_limit_mb": context.memory_limit_in_mb,
        "memory_available_mb": vm_start.available // (1024 * 1024),
        "memory_percent_used": vm_start.percent,
        "active_threads": threading.active_count(),
    }
    logger.info("System details at start", extra={"system_info": system_info_start})

    logger.info("Received event", extra={"event": summarize_event(event)})

    try:
        response = handler(event, context)
        logger.info(
            "Handler executed successfully",
            extra={"response": summarize_response(response)},
        )

        # Log system details at the end
        vm_end = psutil.virtual_memory()
        system_info_end = {
            "memory_available_mb": vm_end.available // (1024 * 1024),
            "memory_percent_used": vm_end.percent,
        }
        logger.info("System details at end", extra={"system_info": system_info_end})

        return response
    except Exception:
        logger.exception("Error processing request")
        # Re-raise the exception to be handled by the error handler middleware
        raise
