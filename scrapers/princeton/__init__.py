"""
Princeton University dining (FoodPro online menus)
"""
