# app/routes/system.py
from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Проверка здоровья сервиса"""
    return {"status": "available"}
