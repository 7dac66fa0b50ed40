"""
Start the Student Registry API locally.

Requires a reachable MongoDB at MONGO_URL (default mongodb://localhost:27017).
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Student Registry Backend")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8080/health")
    print("   - Add Student:   POST http://localhost:8080/add-student")
    print("   - API Docs:           http://localhost:8080/docs")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8080/add-student" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"name": "Alice", "age": 20, "email": "alice@example.com"}\'')
    print()
    print("=" * 60)

    uvicorn.run(
        "student_api.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
        log_level="info"
    )
