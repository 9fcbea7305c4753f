import azure.functions as func

from app import app as fastapi_app

# Warm instances keep the x-mas credential and response cache between invocations.
app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.ANONYMOUS)
