"""
Simple in-memory rate limiter for the login and e-mail confirmation endpoints.
"""
import logging
import time
from collections import defaultdict
from typing import Dict, List
from fastapi import Request, HTTPException, status

from punaboost.core.config import LOGIN_RATE_LIMIT, LOGIN_RATE_WINDOW_SECONDS

logger = logging.getLogger(__name__)

# {ip: [timestamps]}
rate_limit_store: Dict[str, List[float]] = defaultdict(list)


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    
    if request.client:
        return request.client.host
    
    return "unknown"


def check_rate_limit(
    request: Request,
    max_requests: int = LOGIN_RATE_LIMIT,
    window_seconds: int = LOGIN_RATE_WINDOW_SECONDS,
) -> None:
    """
    Check if client has exceeded rate limit.
    
    Raises:
        HTTPException: 429 if rate limit exceeded
    """
    ip = get_client_ip(request)
    now = time.time()
    
    cutoff = now - window_seconds
    rate_limit_store[ip] = [
        timestamp for timestamp in rate_limit_store[ip]
        if timestamp > cutoff
    ]
    
    request_count = len(rate_limit_store[ip])
    
    if request_count >= max_requests:
        logger.warning(f"Rate limit exceeded for IP: {ip} ({request_count} requests in {window_seconds}s)")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Too many login attempts. Maximum {max_requests} requests per {window_seconds} seconds."
        )
    
    rate_limit_store[ip].append(now)


def login_rate_limit(request: Request) -> None:
    """FastAPI dependency wrapper around check_rate_limit with the configured login limits."""
    check_rate_limit(request)
