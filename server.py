#!/usr/bin/env python3
"""
Flask server for Princeton dining menus
"""

from datetime import datetime

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from fallback_menu import get_sample_data
from meal_periods import MEAL_PERIODS
from menu_cache import MenuCache
from menu_service import MenuService
from scheduler import start_scheduler_thread
from scrapers.princeton.scraper import DINING_HALLS
from search import MissingQueryError


def create_app(service: MenuService = None) -> Flask:
    """Build the app around one shared MenuService (and its cache)"""
    app = Flask(__name__)
    # Keep hall and meal order as scraped
    app.json.sort_keys = False
    CORS(app)

    if service is None:
        service = MenuService(MenuCache())
    app.config['MENU_SERVICE'] = service

    @app.route('/api/menus', methods=['GET'])
    def get_menus():
        """
        Menus for every hall on one day

        Query params:
        - day: weekday name (optional, defaults to today)

        Response:
        {
            "Frist": {
                "lunch": {"entrees": [...], "sides": [...], "desserts": [...], "other": [...]}
            },
            ...
        }
        """
        day = request.args.get('day')

        try:
            return jsonify(service.get_menus(day))
        except Exception as e:
            print(f"Error fetching menus: {e}")
            return jsonify({"error": "Failed to fetch menus", "sample": get_sample_data()}), 500

    @app.route('/api/search', methods=['GET'])
    def search():
        """
        Find menu items by name

        Query params:
        - query: text to look for (required, case-insensitive)
        - day: weekday name (optional, defaults to today)

        Response:
        [
            {"item": "Cheese Pizza", "hall": "Frist", "meal": "lunch",
             "category": "entrees", "day": "today"}
        ]
        """
        query = request.args.get('query')
        day = request.args.get('day')

        try:
            results = service.search(query, day)
        except MissingQueryError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            print(f"Error searching menus: {e}")
            return jsonify({"error": str(e)}), 500

        return jsonify([result.to_dict() for result in results])

    @app.route('/api/halls', methods=['GET'])
    def get_halls():
        """Dining hall and meal period reference tables"""
        return jsonify({"halls": DINING_HALLS, "meal_periods": MEAL_PERIODS})

    @app.route('/api/refresh', methods=['GET'])
    def refresh_menus():
        """Manually re-scrape menus for a day"""
        day = request.args.get('day')
        try:
            date, hall_count = service.refresh(day)
            return jsonify({"status": "success", "date": date, "halls": hall_count})
        except Exception as e:
            return jsonify({"status": "error", "message": str(e)}), 500

    @app.route('/api/status', methods=['GET'])
    def status():
        """Health check endpoint"""
        return jsonify({
            "status": "running",
            "timestamp": datetime.now().isoformat(),
            "cached_dates": service.cache.cached_dates()
        })

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Endpoint not found"}), 404

    return app


if __name__ == '__main__':
    app = create_app()

    if config.WARM_CACHE:
        start_scheduler_thread(app.config['MENU_SERVICE'])

    print(f"Server running on http://localhost:{config.PORT}")
    print(f"Menu data will be cached for {config.CACHE_TTL_SECONDS // 60} minutes")
    app.run(host=config.HOST, port=config.PORT)
