# ABOUTME: City weather dashboard over the OpenWeatherMap API.
# ABOUTME: Serve weather_dashboard.web:app with any ASGI server.
