import os, sqlite3

DBS = [
    os.path.join(os.getcwd(), 'stackgallery.db'),
    os.path.join(os.getcwd(), 'instance', 'stackgallery.db'),
]

TABLES = ['users', 'testimonials', 'jobs', 'gallery_posts', 'gallery_likes', 'media', 'questions', 'answers', 'comments', 'tags']

def inspect(db):
    print(f"\n=== {db} ===")
    if not os.path.exists(db):
        print("missing")
        return
    conn = sqlite3.connect(db)
    cur = conn.cursor()
    def q(sql, params=()):
        cur.execute(sql, params)
        return cur.fetchall()
    try:
        for t in TABLES:
            print(f'{t}:', q(f'select count(*) from {t}')[0][0])
        print('users by role:', q('select role, count(*) from users group by role order by role'))
        # every recruiter must carry a company
        print('recruiters without company:', q("select id, username from users where role = 'Recruiter' and company is null"))
        print('comments with media:', q('select id, comment_by, permit_download from comments where media_path is not null order by id'))
    except sqlite3.Error as e:
        print('error:', e)
    finally:
        conn.close()

if __name__ == '__main__':
    for db in DBS:
        inspect(db)
    print('\nDone.')
