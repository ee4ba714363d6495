NEUTRAL_TEXT = ""
DESCRIPTION_SEPARATOR = ", "

# Beverages: (description, cost)
ESPRESSO = ("Espresso", 1.99)
HOUSE_BLEND = ("House Blend Coffee", 0.89)
DARK_ROAST = ("Dark Roast Coffee", 0.99)

# Condiments: (label, surcharge)
MOCHA = ("Mocha", 0.20)
SOY = ("Soy", 0.15)
WHIP = ("Whip", 0.10)
