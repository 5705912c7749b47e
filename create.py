# create.py: create a sign-in account from the command line
from getpass import getpass
from app import create_app
from app.extensions import db
from app.models.account import Account


def main():
    app = create_app()
    with app.app_context():
        email = input("Email: ").strip().lower()
        name = input("Full name: ").strip()
        password = getpass("Password: ")

        # Check existing
        if Account.query.filter_by(email=email).first():
            print("An account with that email already exists.")
            return

        account = Account(name=name, email=email)
        account.set_password(password)
        db.session.add(account)
        db.session.commit()
        print(f"Account {email} created. Sign in to finish onboarding.")

if __name__ == "__main__":
    main()
