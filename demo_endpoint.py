"""
Quick script to run the dashboard API locally.

Starts a reload-enabled server and prints the main endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Invoice Dashboard Backend")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:  GET    http://localhost:8000/health")
    print("   - Login:         POST   http://localhost:8000/login")
    print("   - Cards:         GET    http://localhost:8000/dashboard/cards")
    print("   - Invoices:      GET    http://localhost:8000/invoices?query=&page=1")
    print("   - Create:        POST   http://localhost:8000/invoices")
    print("   - API Docs:             http://localhost:8000/docs")
    print()
    print("Authentication:")
    print("   All endpoints except /health and /login require:")
    print("   Authorization: Bearer <supabase access token>")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/invoices" \\')
    print('     -H "Authorization: Bearer <token>" \\')
    print('     -F customerId=<customer uuid> -F amount=12.50 -F status=pending')
    print()
    print("=" * 60)

    uvicorn.run(
        "dashboard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
