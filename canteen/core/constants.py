"""
Fixed keys, predefined accounts and the seeded canteen menu
"""

STORAGE_KEYS = {
    "users": "mec_canteen_users",
    "menu": "mec_canteen_menu",
    "orders": "mec_canteen_orders",
    "notifications": "mec_canteen_notifications",
    "current_user": "mec_canteen_current_user",
    "dark_mode": "mec_canteen_dark_mode",
}

# Predefined shop and admin accounts. They are never stored in the users
# collection and cannot be deactivated.
PREDEFINED_ACCOUNTS = {
    "shop": {
        "id": "shop-1",
        "email": "canteen@admin",
        "password": "shop123",
        "role": "shop",
        "name": "MEC Canteen Shop",
        "active": True,
    },
    "admin": {
        "id": "admin-1",
        "email": "admin@mec",
        "password": "admin123",
        "role": "admin",
        "name": "MEC Administrator",
        "active": True,
    },
}

DEFAULT_ITEM_IMAGE = "https://images.unsplash.com/photo-1546069901-ba9599a7e63c?w=400"

DEFAULT_MENU = [
    {
        "id": "item-1",
        "name": "Chicken Biryani",
        "price": 120,
        "type": "non-veg",
        "cuisine": "Indian",
        "prepTime": 20,
        "image": "https://images.unsplash.com/photo-1563379091339-03b21ab4a4f8?w=400",
        "description": "Fragrant basmati rice with tender chicken pieces",
    },
    {
        "id": "item-2",
        "name": "Paneer Butter Masala",
        "price": 100,
        "type": "veg",
        "cuisine": "Indian",
        "prepTime": 15,
        "image": "https://images.unsplash.com/photo-1631452180519-c014fe946bc7?w=400",
        "description": "Creamy tomato gravy with soft paneer cubes",
    },
    {
        "id": "item-3",
        "name": "Masala Dosa",
        "price": 60,
        "type": "veg",
        "cuisine": "South Indian",
        "prepTime": 10,
        "image": "https://images.unsplash.com/photo-1630383249896-424e482df921?w=400",
        "description": "Crispy dosa with potato filling",
    },
    {
        "id": "item-4",
        "name": "Veg Fried Rice",
        "price": 80,
        "type": "veg",
        "cuisine": "Chinese",
        "prepTime": 12,
        "image": "https://images.unsplash.com/photo-1603133872878-684f208fb84b?w=400",
        "description": "Stir-fried rice with fresh vegetables",
    },
    {
        "id": "item-5",
        "name": "Grilled Sandwich",
        "price": 50,
        "type": "veg",
        "cuisine": "Continental",
        "prepTime": 8,
        "image": "https://images.unsplash.com/photo-1528735602780-2552fd46c7af?w=400",
        "description": "Toasted sandwich with cheese and veggies",
    },
    {
        "id": "item-6",
        "name": "Coffee",
        "price": 30,
        "type": "beverage",
        "cuisine": "Beverage",
        "prepTime": 5,
        "image": "https://images.unsplash.com/photo-1509042239860-f550ce710b93?w=400",
        "description": "Hot filter coffee",
    },
    {
        "id": "item-7",
        "name": "Mango Juice",
        "price": 40,
        "type": "beverage",
        "cuisine": "Beverage",
        "prepTime": 3,
        "image": "https://images.unsplash.com/photo-1546173159-315724a31696?w=400",
        "description": "Fresh mango juice",
    },
    {
        "id": "item-8",
        "name": "Chicken Wrap",
        "price": 90,
        "type": "non-veg",
        "cuisine": "Continental",
        "prepTime": 12,
        "image": "https://images.unsplash.com/photo-1626700051175-6818013e1d4f?w=400",
        "description": "Grilled chicken wrapped in tortilla",
    },
]
