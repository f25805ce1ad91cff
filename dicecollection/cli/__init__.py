"""Console front end for Dice Collection."""
