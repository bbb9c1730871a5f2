# roster_api/api/endpoints/root.py
from fastapi import APIRouter

from roster_api.core.config import settings

router = APIRouter(tags=["meta"])

ENDPOINTS = {
    "login": "POST /api/auth/login",
    "logout": "POST /api/auth/logout",
    "generateClassUrl": "POST /api/students/class/:className/generate-url (admin only)",
    "getStudentsByClass": "GET /api/students/class/:className/:uniqueId",
    "addStudent": "POST /api/students (admin only)",
    "getStudent": "GET /api/students/:id (admin only)",
    "getAllStudents": "GET /api/students (admin only)",
    "getClasses": "GET /api/classes (admin only)",
}


@router.get("/")
def api_index():
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "endpoints": ENDPOINTS,
    }
